"""Read, size-check and base64-encode outbound email attachments."""

import base64
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from .config import MAX_ATTACHMENTS_BYTES
from .exceptions import ValidationError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AttachmentSpec:
    filename: Optional[str] = None
    path: Optional[str] = None
    content: Union[bytes, str, None] = None
    cid: Optional[str] = None  # content-ID for inline <img src="cid:...">


@dataclass(frozen=True)
class EncodedAttachment:
    filename: str
    content: str  # base64
    cid: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload = {"filename": self.filename, "content": self.content}
        if self.cid:
            payload["cid"] = self.cid
        return payload


def _too_large(max_total_bytes: int) -> ValidationError:
    return ValidationError(
        f"Attachments exceed the maximum allowed size of "
        f"{max_total_bytes // (1024 * 1024)} MB."
    )


def _read(spec: AttachmentSpec, budget: int, max_total_bytes: int) -> bytes:
    """Resolve bytes, refusing files whose size already exceeds ``budget``."""
    if spec.content is not None:
        if isinstance(spec.content, str):
            return spec.content.encode("utf-8")
        return bytes(spec.content)
    try:
        with open(spec.path, "rb") as fh:
            if os.fstat(fh.fileno()).st_size > budget:
                raise _too_large(max_total_bytes)
            return fh.read()
    except OSError as e:
        raise ValidationError(f"Could not read attachment {spec.path!r}: {e}") from e


def _filename(spec: AttachmentSpec) -> str:
    if spec.filename:
        return spec.filename
    if spec.path:
        return os.path.basename(spec.path)
    return ""


def process(
    attachments: Sequence[AttachmentSpec],
    max_total_bytes: int = MAX_ATTACHMENTS_BYTES,
) -> List[EncodedAttachment]:
    """
    Encode attachments in order, failing as soon as the running size total
    passes ``max_total_bytes``. Nothing is returned on failure.
    """
    if not isinstance(attachments, (list, tuple)):
        raise ValidationError("'attachments' must be a list of AttachmentSpec.")
    for index, spec in enumerate(attachments):
        if not isinstance(spec, AttachmentSpec):
            raise ValidationError(f"Attachment {index} must be an AttachmentSpec.")
        if (spec.path is None) == (spec.content is None):
            raise ValidationError(
                f"Attachment {index} must set exactly one of 'path' or 'content'."
            )

    encoded: List[EncodedAttachment] = []
    total = 0
    for spec in attachments:
        data = _read(spec, max_total_bytes - total, max_total_bytes)
        total += len(data)
        if total > max_total_bytes:
            raise _too_large(max_total_bytes)

        name = _filename(spec)
        encoded.append(
            EncodedAttachment(
                filename=name,
                content=base64.b64encode(data).decode("ascii"),
                cid=spec.cid,
            )
        )
        logger.debug("attachment_encoded", filename=name, size=len(data), total=total)
    return encoded
