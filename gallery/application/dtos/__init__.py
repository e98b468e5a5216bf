from .post_dto import CreatePostDTO, DeletePostDTO, PostResponseDTO, UpdatePostDTO

__all__ = [
    "CreatePostDTO",
    "DeletePostDTO",
    "PostResponseDTO",
    "UpdatePostDTO",
]
