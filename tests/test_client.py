"""
Tests for the Python upload client and command-line entry point.
"""

import base64

import pytest
import requests

from picmenu.__main__ import main, save_images, slugify
from picmenu.client import USER_ERROR_MESSAGE, MenuClient, MenuClientError, filter_menu
from picmenu.samples import sample_menu
from tests.fakes import FakeResponse, FakeSession, menu_items

IMAGE = base64.b64encode(b"fake-png").decode("ascii")


@pytest.fixture
def menu_photo(tmp_path):
    path = tmp_path / "menu.jpg"
    path.write_bytes(b"\xff\xd8\xff fake jpeg")
    return str(path)


def test_filter_menu_is_case_insensitive():
    items = [{"name": "Caesar Salad"}, {"name": "Greek salad"}, {"name": "Burger"}]

    assert [i["name"] for i in filter_menu(items, "SALAD")] == ["Caesar Salad", "Greek salad"]
    assert filter_menu(items, "") == items


def test_visualize_uploads_then_parses(menu_photo):
    session = FakeSession([
        FakeResponse(201, {"url": "http://storage.local/m.jpg", "objectName": "x/m.jpg"}),
        FakeResponse(200, {"menu": menu_items(2)}),
    ])
    client = MenuClient("http://api.local/", session=session)

    menu = client.visualize(menu_photo, category="home-style", model="kontext-dev")

    assert len(menu) == 2
    upload_url, upload_kwargs = session.requests[0]
    assert upload_url == "http://api.local/api/upload"
    assert upload_kwargs["files"]["file"][0] == "menu.jpg"
    assert upload_kwargs["files"]["file"][2] == "image/jpeg"
    parse_url, parse_kwargs = session.requests[1]
    assert parse_url == "http://api.local/api/parseMenu"
    assert parse_kwargs["json"] == {
        "menuUrl": "http://storage.local/m.jpg", "category": "home-style", "model": "kontext-dev",
    }


@pytest.mark.parametrize("response", [
    FakeResponse(400, {"error": "Could not extract menu items from image"}, reason="Bad Request"),
    FakeResponse(500, {"error": "Failed to process menu image"}, reason="Internal Server Error"),
    FakeResponse(200, {"error": "Something odd"}),
])
def test_errors_become_a_retry_message(response):
    client = MenuClient(session=FakeSession([response]))

    with pytest.raises(MenuClientError, match="Please try again"):
        client.parse_menu("http://storage.local/m.jpg")


def test_network_errors_become_a_retry_message():
    class BrokenSession:
        def post(self, url, timeout=None, **kwargs):
            raise requests.ConnectionError("refused")

    with pytest.raises(MenuClientError) as exc_info:
        MenuClient(session=BrokenSession()).parse_menu("http://storage.local/m.jpg")
    assert str(exc_info.value) == USER_ERROR_MESSAGE


def test_slugify():
    assert slugify("Crème Brûlée & Co.") == "cr-me-br-l-e-co"
    assert slugify("!!!") == "dish"


def test_save_images_skips_items_without_image(tmp_path):
    items = [
        {"name": "Soup of the Day", "menuImage": {"base64Image": IMAGE}},
        {"name": "Bread"},
    ]

    assert save_images(items, str(tmp_path / "out")) == 1
    assert (tmp_path / "out" / "1-soup-of-the-day.png").read_bytes() == b"fake-png"


def test_main_prints_filtered_menu(monkeypatch, capsys, menu_photo, tmp_path):
    menu = menu_items(3)
    menu[0]["menuImage"] = {"base64Image": IMAGE}
    monkeypatch.setattr(MenuClient, "visualize", lambda self, path, category, model: menu)

    code = main([menu_photo, "--search", "dish 1", "--output", str(tmp_path / "imgs")])

    out = capsys.readouterr().out
    assert code == 0
    assert "Menu - 3 dishes detected" in out
    assert "Dish 1" in out and "Dish 2" not in out
    assert "Saved 1 images" in out


def test_main_reports_failure(monkeypatch, capsys, menu_photo):
    def fail(self, path, category, model):
        raise MenuClientError(USER_ERROR_MESSAGE)

    monkeypatch.setattr(MenuClient, "visualize", fail)

    assert main([menu_photo]) == 1
    assert USER_ERROR_MESSAGE in capsys.readouterr().err


def test_main_missing_file(capsys, tmp_path):
    assert main([str(tmp_path / "nope.jpg")]) == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize("response", [
    FakeResponse(200, ValueError("Expecting value: line 1 column 1")),
    FakeResponse(200, ["not", "an", "object"]),
])
def test_unreadable_success_body_becomes_a_retry_message(response):
    client = MenuClient(session=FakeSession([response]))

    with pytest.raises(MenuClientError) as exc_info:
        client.parse_menu("http://storage.local/m.jpg")
    assert str(exc_info.value) == USER_ERROR_MESSAGE


def test_parse_menu_sends_catalog_defaults():
    session = FakeSession([FakeResponse(200, {"menu": []})])

    MenuClient(session=session).parse_menu("http://storage.local/m.jpg")

    _, kwargs = session.requests[0]
    assert kwargs["json"]["category"] == "fine-dining"
    assert kwargs["json"]["model"] == "flux-1.1-pro"


def test_sample_menu_needs_no_requests():
    session = FakeSession([])
    client = MenuClient(session=session)

    menu = client.sample()

    assert session.requests == []
    assert len(menu) == 6
    assert all(item["name"] and item["price"] and item["description"] for item in menu)
    menu[0]["name"] = "Changed"
    assert client.sample()[0]["name"] == "Bruschetta"
    assert sample_menu() == client.sample()


def test_main_sample_prints_without_uploading(monkeypatch, capsys):
    def fail(self, *args, **kwargs):
        raise AssertionError("sample must not upload")

    monkeypatch.setattr(MenuClient, "visualize", fail)

    code = main(["--sample", "--search", "pizza"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Menu - 6 dishes detected" in out
    assert "Margherita Pizza" in out
    assert "Tiramisu" not in out


def test_main_requires_image_or_sample():
    with pytest.raises(SystemExit):
        main([])
