"""Unit tests for admin authentication and session tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from dami.config import AuthSettings
from dami.domain.error import NotAuthorizedError
from dami.domain.service import AdminAuthService, JWTService, hash_password
from dami.util.jwt import JWTError

PASSWORD = "s3cret-passw0rd"


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(
        jwt_secret="test-secret",
        admin_email="admin@devopswithdami.com",
        admin_password_hash=hash_password(PASSWORD),
    )


class TestAdminAuthService:
    """Tests for AdminAuthService."""

    def test_hash_password_is_sha256_hex(self):
        assert hash_password("password") == (
            "5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8"
        )

    def test_valid_credentials(self, auth_settings):
        service = AdminAuthService(auth_settings)

        email = service.authenticate(" Admin@DevOpsWithDami.com ", PASSWORD)

        assert email == "admin@devopswithdami.com"

    @pytest.mark.parametrize(
        "email,password",
        [
            ("admin@devopswithdami.com", "wrong"),
            ("someone@example.com", PASSWORD),
            ("", ""),
            ("admin@devopswithdami.com", "pässwörd"),
        ],
    )
    def test_invalid_credentials(self, auth_settings, email, password):
        service = AdminAuthService(auth_settings)

        with pytest.raises(NotAuthorizedError, match="Invalid login credentials"):
            service.authenticate(email, password)

    def test_login_refused_without_configured_hash(self):
        service = AdminAuthService(AuthSettings(admin_password_hash=""))

        with pytest.raises(NotAuthorizedError):
            service.authenticate("admin@devopswithdami.com", "")

    def test_is_admin(self, auth_settings):
        service = AdminAuthService(auth_settings)

        assert service.is_admin("ADMIN@devopswithdami.com")
        assert not service.is_admin("other@example.com")


class TestJWTService:
    """Tests for JWTService."""

    def test_token_round_trip(self, auth_settings):
        service = JWTService(auth_settings)

        payload = service.verify_token(service.create_token("admin@devopswithdami.com"))

        assert payload.sub == "admin@devopswithdami.com"
        assert payload.role == "admin"
        assert payload.exp > datetime.now(timezone.utc) + timedelta(days=6)

    def test_token_signed_with_other_secret_rejected(self, auth_settings):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token("admin@devopswithdami.com")

        with pytest.raises(JWTError, match="Invalid token"):
            JWTService(auth_settings).verify_token(token)

    def test_expired_token_rejected(self, auth_settings):
        token = jwt.encode(
            {
                "sub": "admin@devopswithdami.com",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            JWTService(auth_settings).verify_token(token)

    def test_get_admin_from_token_never_raises(self, auth_settings):
        service = JWTService(auth_settings)

        assert service.get_admin_from_token(None) is None
        assert service.get_admin_from_token("garbage") is None
        assert (
            service.get_admin_from_token(service.create_token("admin@devopswithdami.com"))
            == "admin@devopswithdami.com"
        )
