import io

import pytest

from gptkit.formdata import FormBuilder
from gptkit.image import (
    CREATE_IMAGE_RESPONSE_FORMAT_URL,
    CREATE_IMAGE_SIZE_256X256,
    ImageEditRequest,
    ImageRequest,
    ImageResponse,
    ImageResponseData,
    ImageVariRequest,
)


class MockFailure(Exception):
    pass


class MockFormBuilder:
    def __init__(self, fail_file=None, fail_field=None, fail_close=False):
        self.fail_file = fail_file
        self.fail_field = fail_field
        self.fail_close = fail_close
        self.calls = []

    def create_form_file(self, fieldname, file):
        self.calls.append(("file", fieldname))
        if self.fail_file in ("*", fieldname):
            raise MockFailure("mock form builder fail")

    def write_field(self, fieldname, value):
        self.calls.append(("field", fieldname, value))
        if fieldname == self.fail_field:
            raise MockFailure("mock form builder fail")

    def close(self):
        self.calls.append(("close",))
        if self.fail_close:
            raise MockFailure("mock form builder fail")

    def form_data_content_type(self):
        return "multipart/form-data; boundary=mock"


EDIT_REQUEST = ImageEditRequest(mask=object())


@pytest.mark.parametrize(
    "builder",
    [
        MockFormBuilder(fail_file="*"),
        MockFormBuilder(fail_file="mask"),
        MockFormBuilder(fail_field="prompt"),
        MockFormBuilder(fail_field="n"),
        MockFormBuilder(fail_field="size"),
        MockFormBuilder(fail_field="response_format"),
        MockFormBuilder(fail_close=True),
    ],
)
def test_image_form_builder_failures(builder):
    with pytest.raises(MockFailure, match="mock form builder fail"):
        EDIT_REQUEST.build_form(builder)


@pytest.mark.parametrize(
    "builder",
    [
        MockFormBuilder(fail_file="*"),
        MockFormBuilder(fail_field="n"),
        MockFormBuilder(fail_field="size"),
        MockFormBuilder(fail_field="response_format"),
        MockFormBuilder(fail_close=True),
    ],
)
def test_vari_image_form_builder_failures(builder):
    with pytest.raises(MockFailure, match="mock form builder fail"):
        ImageVariRequest().build_form(builder)


def test_edit_form_order_and_values():
    builder = MockFormBuilder()
    content_type = ImageEditRequest(
        image=object(), mask=object(), prompt="p", n=2, size="512x512", response_format="url"
    ).build_form(builder)
    assert content_type == "multipart/form-data; boundary=mock"
    assert builder.calls == [
        ("file", "image"),
        ("file", "mask"),
        ("field", "prompt", "p"),
        ("field", "n", "2"),
        ("field", "size", "512x512"),
        ("field", "response_format", "url"),
        ("close",),
    ]


def test_edit_form_skips_missing_mask():
    builder = MockFormBuilder()
    ImageEditRequest(image=object()).build_form(builder)
    assert ("file", "mask") not in builder.calls
    assert ("field", "n", "0") in builder.calls


def test_vari_form_with_real_builder(tmp_path):
    path = tmp_path / "img.png"
    path.write_bytes(b"PNGDATA")
    body = io.BytesIO()
    builder = FormBuilder(body, boundary="xyz")
    with open(path, "rb") as image:
        content_type = ImageVariRequest(image=image, n=1, size="256x256").build_form(builder)
    data = body.getvalue()
    assert content_type == "multipart/form-data; boundary=xyz"
    assert b"PNGDATA" in data
    assert b'name="n"\r\n\r\n1\r\n' in data
    assert b'name="size"\r\n\r\n256x256\r\n' in data
    assert data.endswith(b"\r\n--xyz--\r\n")


def test_image_request_to_dict():
    assert ImageRequest().to_dict() == {}
    req = ImageRequest(
        prompt="Parrot on a skateboard",
        size=CREATE_IMAGE_SIZE_256X256,
        response_format=CREATE_IMAGE_RESPONSE_FORMAT_URL,
        n=1,
    )
    assert req.to_dict() == {
        "prompt": "Parrot on a skateboard",
        "n": 1,
        "size": "256x256",
        "response_format": "url",
    }


def test_image_response_from_dict():
    resp = ImageResponse.from_dict(
        {
            "created": 1700000000,
            "data": [
                {"url": "https://example.com/a.png", "revised_prompt": "rp"},
                {"b64_json": "aGVsbG8="},
            ],
        }
    )
    assert resp.created == 1700000000
    assert resp.data == [
        ImageResponseData(url="https://example.com/a.png", revised_prompt="rp"),
        ImageResponseData(b64_json="aGVsbG8="),
    ]
    assert ImageResponse.from_dict({}) == ImageResponse()