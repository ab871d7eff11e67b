"""Image generation, edit and variation requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CREATE_IMAGE_SIZE_256X256 = "256x256"
CREATE_IMAGE_SIZE_512X512 = "512x512"
CREATE_IMAGE_SIZE_1024X1024 = "1024x1024"
CREATE_IMAGE_SIZE_1792X1024 = "1792x1024"
CREATE_IMAGE_SIZE_1024X1792 = "1024x1792"

CREATE_IMAGE_RESPONSE_FORMAT_URL = "url"
CREATE_IMAGE_RESPONSE_FORMAT_B64_JSON = "b64_json"

CREATE_IMAGE_MODEL_DALL_E2 = "dall-e-2"
CREATE_IMAGE_MODEL_DALL_E3 = "dall-e-3"

CREATE_IMAGE_QUALITY_HD = "hd"
CREATE_IMAGE_QUALITY_STANDARD = "standard"

CREATE_IMAGE_STYLE_VIVID = "vivid"
CREATE_IMAGE_STYLE_NATURAL = "natural"

IMAGE_GENERATIONS_SUFFIX = "/images/generations"
IMAGE_EDITS_SUFFIX = "/images/edits"
IMAGE_VARIATIONS_SUFFIX = "/images/variations"


@dataclass
class ImageRequest:
    """A request to generate images from a prompt."""

    prompt: str = ""
    model: str = ""
    n: int = 0
    quality: str = ""
    size: str = ""
    style: str = ""
    response_format: str = ""
    user: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out unset fields."""
        pairs = [
            ("prompt", self.prompt),
            ("model", self.model),
            ("n", self.n),
            ("quality", self.quality),
            ("size", self.size),
            ("style", self.style),
            ("response_format", self.response_format),
            ("user", self.user),
        ]
        return {key: value for key, value in pairs if value}


@dataclass
class ImageResponseData:
    """One generated image."""

    url: str = ""
    b64_json: str = ""
    revised_prompt: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImageResponseData:
        return cls(
            url=data.get("url") or "",
            b64_json=data.get("b64_json") or "",
            revised_prompt=data.get("revised_prompt") or "",
        )


@dataclass
class ImageResponse:
    """The response of an image endpoint."""

    created: int = 0
    data: list[ImageResponseData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImageResponse:
        return cls(
            created=data.get("created") or 0,
            data=[ImageResponseData.from_dict(item) for item in data.get("data") or []],
        )


@dataclass
class ImageEditRequest:
    """A request to edit an image, with an optional mask."""

    image: Any = None
    mask: Any = None
    prompt: str = ""
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""

    def build_form(self, builder: Any) -> str:
        """Write the request to a form builder and return its content type."""
        builder.create_form_file("image", self.image)
        if self.mask is not None:
            builder.create_form_file("mask", self.mask)
        builder.write_field("prompt", self.prompt)
        builder.write_field("n", str(self.n))
        builder.write_field("size", self.size)
        builder.write_field("response_format", self.response_format)
        builder.close()
        return builder.form_data_content_type()


@dataclass
class ImageVariRequest:
    """A request for variations of an image."""

    image: Any = None
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""

    def build_form(self, builder: Any) -> str:
        """Write the request to a form builder and return its content type."""
        builder.create_form_file("image", self.image)
        builder.write_field("n", str(self.n))
        builder.write_field("size", self.size)
        builder.write_field("response_format", self.response_format)
        builder.close()
        return builder.form_data_content_type()