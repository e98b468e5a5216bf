from ..application.password import PasswordGuard
from ..application.services import (
    CreatePostService,
    DeletePostService,
    GetPostService,
    ListPostsService,
    UpdatePostService,
)
from ..config import settings
from ..infrastructure.adapters import DynamoDbPostRepository, S3ImageStorage
from ..infrastructure.aws import get_posts_table, get_s3_client


def get_repository() -> DynamoDbPostRepository:
    return DynamoDbPostRepository(get_posts_table())


def get_image_storage() -> S3ImageStorage:
    return S3ImageStorage(
        client=get_s3_client(),
        bucket=settings.gallery_bucket,
        region=settings.aws_region,
    )


def get_password_guard() -> PasswordGuard:
    return PasswordGuard(settings.gallery_password)


def get_list_posts_service() -> ListPostsService:
    return ListPostsService(get_repository())


def get_get_post_service() -> GetPostService:
    return GetPostService(get_repository())


def get_create_post_service() -> CreatePostService:
    return CreatePostService(get_repository(), get_image_storage(), get_password_guard())


def get_update_post_service() -> UpdatePostService:
    return UpdatePostService(get_repository(), get_image_storage(), get_password_guard())


def get_delete_post_service() -> DeletePostService:
    return DeletePostService(get_repository(), get_image_storage(), get_password_guard())
