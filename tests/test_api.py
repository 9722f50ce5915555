"""API tests using FastAPI TestClient."""
import pytest

from src.config import Settings
from src.domain.errors import DeletionFailureError
from src.interfaces.api.app import create_app
from tests.conftest import FIXED_MILLIS


def _post_video(client, name="clip.mp4", content_type="video/mp4", data=b"fake-mp4", field="videoFile"):
    return client.post("/upload", files={field: (name, data, content_type)})


class TestUpload:
    """Test POST /upload"""

    def test_accepts_mp4(self, client, repository):
        response = _post_video(client)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "File uploaded successfully!"
        assert body["filename"] == f"{FIXED_MILLIS}-clip.mp4"
        assert (repository.upload_dir / body["filename"]).read_bytes() == b"fake-mp4"

    def test_rejects_other_type(self, client, repository):
        response = _post_video(client, name="notes.txt", content_type="text/plain")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "No file uploaded or invalid format."}
        assert list(repository.upload_dir.iterdir()) == []

    def test_missing_file_field(self, client):
        response = _post_video(client, field="other")

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_plain_form_value_instead_of_file(self, client, repository):
        response = client.post("/upload", data={"videoFile": "not-a-file"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "No file uploaded or invalid format."}
        assert list(repository.upload_dir.iterdir()) == []

    def test_overlong_filename_rejected(self, client, repository):
        response = _post_video(client, name="a" * 300 + ".mp4")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert list(repository.upload_dir.iterdir()) == []

    def test_write_failure_hides_server_path(self, client, repository, monkeypatch):
        def fail(*args, **kwargs):
            raise OSError(36, "File name too long", str(repository.upload_dir / "x.mp4"))

        monkeypatch.setattr("src.infrastructure.persistence.video_repository.write_stream_exclusive", fail)
        response = _post_video(client)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to store uploaded file."}

    def test_rejects_unsafe_filename(self, client, repository):
        response = _post_video(client, name="..")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert list(repository.upload_dir.iterdir()) == []


class TestListVideos:
    """Test GET /videos"""

    def test_empty(self, client):
        response = client.get("/videos")
        assert response.status_code == 200
        assert response.json() == []

    def test_only_mp4_newest_first(self, client, repository, clock):
        _post_video(client, name="first.mp4")
        clock.advance(5)
        _post_video(client, name="second.mp4")
        (repository.upload_dir / "notes.txt").write_text("x")

        assert client.get("/videos").json() == [
            f"{FIXED_MILLIS + 5}-second.mp4",
            f"{FIXED_MILLIS}-first.mp4",
        ]


class TestVideoInfo:
    """Test GET /videos/{filename}/info"""

    def test_info(self, client):
        stored = _post_video(client, data=b"123").json()["filename"]

        body = client.get(f"/videos/{stored}/info").json()
        assert body["filename"] == stored
        assert body["original_filename"] == "clip.mp4"
        assert body["size_bytes"] == 3

    def test_info_missing(self, client):
        response = client.get("/videos/missing.mp4/info")
        assert response.status_code == 404
        assert response.json()["success"] is False


class TestDelete:
    """Test DELETE /delete/{filename}"""

    def test_missing(self, client):
        response = client.delete("/delete/missing.mp4")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_encoded_traversal_does_not_escape(self, client, repository):
        outside = repository.upload_dir.parent / "outside.mp4"
        outside.write_bytes(b"keep me")

        response = client.delete("/delete/..%2Foutside.mp4")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "File not found."}
        assert outside.read_bytes() == b"keep me"

    def test_encoded_traversal_deletes_sanitized_name_inside(self, client, repository):
        inside = repository.upload_dir / "inside.mp4"
        inside.write_bytes(b"")
        outside = repository.upload_dir.parent / "inside.mp4"
        outside.write_bytes(b"keep me")

        response = client.delete("/delete/..%2Finside.mp4")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert not inside.exists()
        assert outside.read_bytes() == b"keep me"

    def test_deletion_failure(self, client, repository, monkeypatch):
        stored = _post_video(client).json()["filename"]

        def fail(name):
            raise DeletionFailureError(filename=name)

        monkeypatch.setattr(repository, "delete_video", fail)
        response = client.delete(f"/delete/{stored}")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to delete file."}


class TestPages:
    """Test landing page and health"""

    def test_index_missing(self, client):
        response = client.get("/")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")

    def test_index_served(self, client, test_settings):
        test_settings.public_dir.mkdir(parents=True, exist_ok=True)
        test_settings.get_index_page().write_text("<h1>Videos</h1>")

        response = client.get("/")
        assert response.status_code == 200
        assert "<h1>Videos</h1>" in response.text

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "storage_writable": True}


class TestAppFactory:
    """Test app construction"""

    def test_startup_aborts_when_directory_cannot_be_created(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        with pytest.raises(OSError):
            create_app(Settings(public_dir=tmp_path, upload_dir=blocker / "uploads"))

    def test_end_to_end(self, client):
        stored = _post_video(client).json()["filename"]
        assert stored == f"{FIXED_MILLIS}-clip.mp4"
        assert stored in client.get("/videos").json()

        response = client.delete(f"/delete/{stored}")
        assert response.status_code == 200
        assert response.json()["success"] is True

        assert stored not in client.get("/videos").json()
