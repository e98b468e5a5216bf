from ...domain.ports import PostRepository
from ..dtos import PostResponseDTO


class GetPostService:
    """Service implementing the get post use case."""

    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def execute(self, post_id: str) -> PostResponseDTO | None:
        """Get the post stored under an id, or None."""
        post = self._repository.get_by_id(post_id)
        if not post:
            return None
        return PostResponseDTO.from_entity(post)
