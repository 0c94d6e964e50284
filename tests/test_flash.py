from starlette.requests import Request

from app.core.flash import FlashMessage, flash, pop_flashes


def make_request(session=None):
    return Request({"type": "http", "session": {} if session is None else session})


def test_flash_is_read_once():
    request = make_request()
    flash(request, "Successfully created comment.")

    assert pop_flashes(request) == [FlashMessage("notice", "Successfully created comment.")]
    assert pop_flashes(request) == []


def test_flashes_keep_order_and_category():
    request = make_request()
    flash(request, "first")
    flash(request, "second", category="alert")

    assert pop_flashes(request) == [
        FlashMessage("notice", "first"),
        FlashMessage("alert", "second"),
    ]


def test_flash_is_scoped_to_session():
    mine = make_request()
    other = make_request()
    flash(mine, "only mine")

    assert pop_flashes(other) == []
    assert [f.message for f in pop_flashes(mine)] == ["only mine"]
