"""Post DTOs mirroring the request models declared on the API gateway."""

from pydantic import BaseModel, ConfigDict, Field

from ...domain.entities import Post


class _RequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    password: str


class CreatePostDTO(_RequestDTO):
    """DTO for creating a post. Every field is required, image included."""

    title: str
    author: str
    description: str
    locale: str
    date_post: str = Field(..., alias="datePost")
    image: str = Field(..., min_length=1)


class UpdatePostDTO(_RequestDTO):
    """DTO for updating a post.

    The image is optional. keyImage and urlImage echoed back by clients
    are accepted and ignored; the stored post's image key is used instead.
    """

    title: str
    author: str
    description: str
    locale: str
    date_post: str = Field(..., alias="datePost")
    created_at: str = Field(..., alias="createdAt")
    image: str | None = None


class DeletePostDTO(_RequestDTO):
    """DTO for deleting a post."""

    created_at: str = Field(..., alias="createdAt")


class PostResponseDTO(BaseModel):
    """DTO for post responses, serialized with camelCase names."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: str = Field(..., alias="createdAt")
    title: str
    author: str
    description: str
    locale: str
    date_post: str = Field(..., alias="datePost")
    url_image: str = Field(..., alias="urlImage")
    key_image: str = Field(..., alias="keyImage")

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponseDTO":
        return cls(
            id=post.id,
            created_at=post.created_at,
            title=post.title,
            author=post.author,
            description=post.description,
            locale=post.locale,
            date_post=post.date_post,
            url_image=post.url_image,
            key_image=post.key_image,
        )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)
