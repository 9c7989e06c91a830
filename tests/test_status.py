import pytest

from thoth.status import HttpStatusCode, HttpStatusError


@pytest.mark.parametrize(
    "member, value",
    [
        (HttpStatusCode.CONTINUE, 100),
        (HttpStatusCode.OK, 200),
        (HttpStatusCode.IM_USED, 226),
        (HttpStatusCode.BAD_REQUEST, 400),
        (HttpStatusCode.CONTENT_TOO_LARGE, 413),
        (HttpStatusCode.IM_A_TEAPOT, 418),
        (HttpStatusCode.NETWORK_AUTHENTICATION_REQUIRED, 511),
    ],
)
def test_codes_have_standard_values(member, value):
    assert HttpStatusCode(value) is member
    assert int(member) == value


def test_codes_are_unique():
    values = [int(HttpStatusError(int(code)).status) for code in HttpStatusCode]
    assert len(values) == len(set(values))


def test_error_keeps_status():
    error = HttpStatusError(HttpStatusCode.NOT_FOUND)
    assert error.status is HttpStatusCode.NOT_FOUND


def test_error_accepts_plain_int():
    error = HttpStatusError(400)
    assert error.status is HttpStatusCode.BAD_REQUEST
    assert str(error).startswith("400")


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        HttpStatusError(999)


def test_error_is_raisable():
    error = HttpStatusError(HttpStatusCode.CONTENT_TOO_LARGE)
    assert error.status is HttpStatusCode.CONTENT_TOO_LARGE
    assert str(error).startswith("413")
    with pytest.raises(HttpStatusError) as info:
        raise error
    assert info.value.status == 413