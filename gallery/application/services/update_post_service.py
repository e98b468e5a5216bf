import structlog

from ...domain.entities import Post, PostKey
from ...domain.exceptions import PostNotFoundError
from ...domain.ports import ImageStorage, PostChanges, PostRepository
from ...domain.value_objects import ImagePayload
from ..dtos import PostResponseDTO, UpdatePostDTO
from ..password import PasswordGuard

logger = structlog.get_logger()


class UpdatePostService:
    """
    Application service implementing the update post use case.

    The stored image is replaced only when the request carries a new one,
    in which case it is written over the stored post's object key. Keys
    sent by the client are never trusted.
    """

    def __init__(
        self,
        repository: PostRepository,
        storage: ImageStorage,
        password_guard: PasswordGuard,
    ) -> None:
        self._repository = repository
        self._storage = storage
        self._password_guard = password_guard

    def execute(self, post_id: str, dto: UpdatePostDTO) -> PostResponseDTO:
        self._password_guard.verify(dto.password)

        key = PostKey(id=post_id, created_at=dto.created_at)
        changes = PostChanges(
            title=dto.title,
            author=dto.author,
            description=dto.description,
            locale=dto.locale,
            date_post=dto.date_post,
        )

        if dto.image:
            image = ImagePayload(dto.image)
            body = image.decode()
            key_image = self._stored_post(key).key_image
            changes.url_image = self._storage.put(key_image, body, image.mime_type)
            changes.key_image = key_image
            logger.info(
                "Post image replaced",
                post_id=post_id,
                key_image=key_image,
                content_type=image.mime_type,
            )

        post = self._repository.update(key, changes)

        logger.info("Post updated", post_id=post_id, created_at=dto.created_at)
        return PostResponseDTO.from_entity(post)

    def _stored_post(self, key: PostKey) -> Post:
        """Stored post, checked before anything is uploaded."""
        existing = self._repository.get(key)
        if not existing:
            raise PostNotFoundError(key.id, key.created_at)
        return existing
