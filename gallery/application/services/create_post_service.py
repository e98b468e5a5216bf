from uuid import uuid4

import structlog

from ...domain.entities import Post
from ...domain.ports import ImageStorage, PostRepository
from ...domain.value_objects import ImagePayload
from ..dtos import CreatePostDTO, PostResponseDTO
from ..password import PasswordGuard

logger = structlog.get_logger()


class CreatePostService:
    """
    Application service implementing the create post use case.

    The image is uploaded before the record is written. A failed table
    write leaves the uploaded blob in place.
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

    def execute(self, dto: CreatePostDTO) -> PostResponseDTO:
        self._password_guard.verify(dto.password)

        image = ImagePayload(dto.image)
        body = image.decode()
        key_image = str(uuid4())
        url_image = self._storage.put(key_image, body, image.mime_type)

        post = Post.create(
            title=dto.title,
            author=dto.author,
            description=dto.description,
            locale=dto.locale,
            date_post=dto.date_post,
            url_image=url_image,
            key_image=key_image,
        )
        self._repository.create(post)

        logger.info(
            "Post created",
            post_id=post.id,
            created_at=post.created_at,
            key_image=key_image,
            content_type=image.mime_type,
        )
        return PostResponseDTO.from_entity(post)
