# ==============================================================================
# HELPER TESTS
# ==============================================================================
# Tests for blob naming helpers
# ==============================================================================

from online_course.services.course_service import thumbnail_blob_name
from online_course.services.user_profile_service import profile_picture_blob_name
from online_course.utils.helpers import blob_safe_name, file_extension


class TestFileExtension:
    """Extension taken from an uploaded file name."""

    def test_last_dot_wins(self):
        assert file_extension("intro.video.png") == "png"

    def test_name_without_dot_is_returned_whole(self):
        assert file_extension("README") == "README"

    def test_empty_name(self):
        assert file_extension("") == ""
        assert file_extension(None) == ""


class TestBlobNames:
    """Thumbnail and profile picture blob names."""

    def test_blob_safe_name_replaces_separators(self):
        assert blob_safe_name(" CI/CD Basics ") == "CI_CD_Basics"
        assert blob_safe_name("Ops\\Infra") == "Ops_Infra"

    def test_thumbnail_name_keeps_course_id_for_slashed_titles(self):
        first = thumbnail_blob_name(1, "CI/CD Basics", "a.png")
        second = thumbnail_blob_name(2, "CI/CD Basics", "a.png")

        assert first == "1_CI_CD_Basics.png"
        assert "/" not in first
        assert first != second

    def test_thumbnail_name_for_file_without_extension(self):
        assert thumbnail_blob_name(7, "Title", "README") == "7_Title.README"

    def test_profile_picture_name(self):
        assert profile_picture_blob_name(5, "me.jpeg") == "5_profile_picture.jpeg"
