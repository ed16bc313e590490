"""
Literal "add product" payloads sent to the Product Service.

One payload per encoding. The bodies are fixed; only the way each is put on
the wire differs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ProductPayload:
    """
    A fixed outbound request body.

    Attributes:
        encoding: Short name used in routes and logs
        content: Raw body bytes, sent as-is with ``content_type``
        content_type: Explicit Content-Type header for ``content``
        form: Form fields, encoded by httpx which also sets the header
    """

    encoding: str
    content: bytes | None = None
    content_type: str | None = None
    form: dict[str, str] = field(default_factory=dict)

    def request_kwargs(self) -> dict[str, Any]:
        """Build the keyword arguments for ``httpx.AsyncClient.stream``."""
        if self.content is not None:
            return {"content": self.content, "headers": {"Content-Type": self.content_type}}
        return {"data": dict(self.form)}


URLENCODED = ProductPayload(
    encoding="urlencoded",
    content=b"name=iPhoneX&number=100",
    content_type="application/x-www-form-urlencoded",
)

POST_FORM = ProductPayload(
    encoding="post-form",
    form={"name": "iMac", "number": "1000"},
)

JSON = ProductPayload(
    encoding="json",
    content=b'{"name":"MacPro","number":10000}',
    content_type="application/json",
)

XML = ProductPayload(
    encoding="xml",
    content=b"<Product><name>MacAir</name><number>100000</number></Product>",
    content_type="application/xml",
)

ALL_PAYLOADS: tuple[ProductPayload, ...] = (URLENCODED, POST_FORM, JSON, XML)
