from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """Settings of a RequestExecutor.

    Attributes:
        content_type: Value of the Content-Type header sent with payloads.
        encoding: Text encoding of request payloads and response bodies.
    """

    content_type: str = "application/json"
    encoding: str = "utf-8"
