from gathering.services.assembler import assemble_payload
from gathering.services.publisher import HttpPublisher, PublishError, Publisher

__all__ = [
    "HttpPublisher",
    "PublishError",
    "Publisher",
    "assemble_payload",
]
