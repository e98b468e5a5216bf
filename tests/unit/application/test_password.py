import pytest

from gallery.application.password import PasswordGuard
from gallery.domain.exceptions import InvalidPasswordError


class TestPasswordGuard:
    def test_matching_password_passes(self):
        PasswordGuard("s3cret").verify("s3cret")

    def test_mismatch_raises(self):
        with pytest.raises(InvalidPasswordError, match="Invalid password"):
            PasswordGuard("s3cret").verify("wrong")

    def test_comparison_is_case_sensitive(self):
        with pytest.raises(InvalidPasswordError):
            PasswordGuard("s3cret").verify("S3CRET")

    def test_empty_configured_password_rejects_everything(self):
        with pytest.raises(InvalidPasswordError):
            PasswordGuard("").verify("")

    def test_non_ascii_password(self):
        PasswordGuard("senhaválida").verify("senhaválida")
