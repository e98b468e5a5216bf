from gallery.application.services import GetPostService, ListPostsService


class TestGetPostService:
    def test_execute_returns_dto(self, mock_repository, stored_post):
        mock_repository.get_by_id.return_value = stored_post

        result = GetPostService(mock_repository).execute("post-123")

        mock_repository.get_by_id.assert_called_once_with("post-123")
        assert result.id == "post-123"
        assert result.to_json_dict()["createdAt"] == "2024-01-15T10:00:00.000Z"

    def test_execute_returns_none_for_unknown_id(self, mock_repository):
        mock_repository.get_by_id.return_value = None

        assert GetPostService(mock_repository).execute("missing") is None


class TestListPostsService:
    def test_execute_maps_every_post(self, mock_repository, stored_post):
        mock_repository.list_all.return_value = [stored_post, stored_post]

        result = ListPostsService(mock_repository).execute()

        assert len(result) == 2
        assert all(dto.title == "Sunset" for dto in result)

    def test_execute_empty_table(self, mock_repository):
        mock_repository.list_all.return_value = []

        assert ListPostsService(mock_repository).execute() == []
