"""GCSStorage 테스트"""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from google.api_core.exceptions import Forbidden, NotFound
from google.auth.exceptions import DefaultCredentialsError

from imagescan.infra.storage import GCSStorage, StorageError, get_storage, set_storage

MODULE = "imagescan.infra.storage.gcs"


def _blob(name: str) -> MagicMock:
    blob = MagicMock()
    blob.name = name
    return blob


class TestGCSStorage:
    def setup_method(self) -> None:
        self.client = MagicMock()
        self.storage = GCSStorage(project="test-project", client=self.client)

    def test_list_files_returns_names_in_order(self) -> None:
        self.client.list_blobs.return_value = iter([_blob("b.jpg"), _blob("a.jpg")])

        names = self.storage.list_files("camera-images")

        assert names == ["b.jpg", "a.jpg"]
        self.client.list_blobs.assert_called_once_with("camera-images")

    def test_missing_bucket_raises_storage_error(self) -> None:
        self.client.list_blobs.side_effect = NotFound("bucket not found")

        with pytest.raises(StorageError, match="camera-images") as exc_info:
            self.storage.list_files("camera-images")

        assert isinstance(exc_info.value.__cause__, NotFound)

    def test_error_while_paging_raises_storage_error(self) -> None:
        def pages() -> Iterator[MagicMock]:
            yield _blob("a.jpg")
            raise Forbidden("no access")

        self.client.list_blobs.return_value = pages()

        with pytest.raises(StorageError):
            self.storage.list_files("camera-images")

    @patch(f"{MODULE}.storage.Client")
    def test_client_created_lazily_with_project(self, mock_client_cls: MagicMock) -> None:
        storage = GCSStorage(project="test-project")
        mock_client_cls.assert_not_called()

        mock_client_cls.return_value.list_blobs.return_value = []
        storage.list_files("camera-images")
        storage.list_files("camera-images")

        mock_client_cls.assert_called_once_with(project="test-project")

    @patch(f"{MODULE}.storage.Client")
    def test_missing_credentials_raises_storage_error(self, mock_client_cls: MagicMock) -> None:
        mock_client_cls.side_effect = DefaultCredentialsError("no credentials")

        with pytest.raises(StorageError):
            GCSStorage().list_files("camera-images")


class TestGetStorage:
    def setup_method(self) -> None:
        set_storage(None)

    def test_default_returns_gcs_with_project(self) -> None:
        with patch("imagescan.infra.storage.get_settings") as mock_settings:
            mock_settings.return_value.project = "test-project"
            storage = get_storage()
        assert isinstance(storage, GCSStorage)
        assert storage.project == "test-project"

    def test_set_storage_overrides(self) -> None:
        fake = MagicMock()
        set_storage(fake)
        assert get_storage() is fake
