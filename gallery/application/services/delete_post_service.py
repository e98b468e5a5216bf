import structlog

from ...domain.entities import PostKey
from ...domain.ports import ImageStorage, PostRepository
from ..dtos import DeletePostDTO, PostResponseDTO
from ..password import PasswordGuard

logger = structlog.get_logger()


class DeletePostService:
    """
    Application service implementing the delete post use case.

    The record is removed first, then its image. A failed image delete
    does not restore the record.
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

    def execute(self, post_id: str, dto: DeletePostDTO) -> PostResponseDTO:
        self._password_guard.verify(dto.password)

        post = self._repository.delete(PostKey(id=post_id, created_at=dto.created_at))
        if post.key_image:
            self._storage.delete(post.key_image)

        logger.info(
            "Post deleted",
            post_id=post.id,
            created_at=post.created_at,
            key_image=post.key_image,
        )
        return PostResponseDTO.from_entity(post)
