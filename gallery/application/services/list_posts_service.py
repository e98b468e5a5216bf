from ...domain.ports import PostRepository
from ..dtos import PostResponseDTO


class ListPostsService:
    """Service returning every post in the gallery."""

    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self) -> list[PostResponseDTO]:
        return [PostResponseDTO.from_entity(post) for post in self._repository.list_all()]
