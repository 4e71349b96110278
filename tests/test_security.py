from datetime import timedelta

from jose import jwt

from cms_site.core.security import create_preview_token, verify_preview_token


def test_token_round_trip(settings):
    token = create_preview_token(settings, "pages", "about")
    assert verify_preview_token(settings, token, "pages", "about")


def test_token_is_scoped_to_document(settings):
    token = create_preview_token(settings, "pages", "about")
    assert not verify_preview_token(settings, token, "pages", "contact")
    assert not verify_preview_token(settings, token, "posts", "about")


def test_expired_token_rejected(settings):
    token = create_preview_token(settings, "posts", "first-post", expires_delta=timedelta(seconds=-1))
    assert not verify_preview_token(settings, token, "posts", "first-post")


def test_wrong_secret_rejected(settings):
    other = settings.model_copy(update={"PAYLOAD_SECRET": "another-secret"})
    token = create_preview_token(other, "pages", "about")
    assert not verify_preview_token(settings, token, "pages", "about")


def test_non_preview_token_rejected(settings):
    token = jwt.encode({"sub": "pages:about", "type": "access"}, settings.PAYLOAD_SECRET, algorithm="HS256")
    assert not verify_preview_token(settings, token, "pages", "about")


def test_garbage_rejected(settings):
    assert not verify_preview_token(settings, "not-a-jwt", "pages", "about")
