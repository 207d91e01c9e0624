import pytest

from teamgen.services.identity import IdentityError, decode_identity


def test_decodes_sub_without_verifying_signature(make_token):
    token = make_token({"sub": "abc"}, key="some-other-issuer-key-0123456789abcdef")
    assert decode_identity(f"Bearer {token}") == "abc"


def test_falls_back_to_user_id_claim(make_token):
    token = make_token({"user_id": 42})
    assert decode_identity(f"Bearer {token}") == "42"


def test_claim_order_is_configurable(make_token):
    token = make_token({"sub": "a", "uid": "b"})
    assert decode_identity(f"bearer {token}", claims=("uid", "sub")) == "b"


@pytest.mark.parametrize("header", ["", "Bearer", "Basic dXNlcjpwYXNz", "Bearer not-a-jwt"])
def test_rejects_bad_headers(header):
    with pytest.raises(IdentityError):
        decode_identity(header)


def test_rejects_token_without_identity(make_token):
    with pytest.raises(IdentityError):
        decode_identity(f"Bearer {make_token({'name': 'Alice'})}")


def test_api_requires_identity(client):
    res = client.get("/api/stats")
    assert res.status_code == 401
    assert "error" in res.get_json()
