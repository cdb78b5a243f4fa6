"""Block id allocation and document validation."""

from collections import Counter
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from mailcanvas.blocks.models import (
    BlockKind,
    ButtonBlock,
    EmailDocument,
    ImageBlock,
    TextBlock,
    UnknownBlock,
)


class ValidationIssue(BaseModel):
    block_id: str | None = None
    field: str
    message: str


class ValidationResult(BaseModel):
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def generate_block_id(kind: Any, existing_ids: Iterable[str]) -> str:
    """Return the first free ``"{kind}-{n}"`` id, counting from 1."""
    if isinstance(kind, BlockKind):
        kind = kind.value
    prefix = str(kind or "block")
    taken = set(existing_ids)

    counter = 1
    new_id = f"{prefix}-{counter}"
    while new_id in taken:
        counter += 1
        new_id = f"{prefix}-{counter}"
    return new_id


def validate(document: EmailDocument) -> ValidationResult:
    """Report content problems that do not break rendering but would look wrong."""
    result = ValidationResult()

    order_counts = Counter(b.order_id for b in document.blocks if b.order_id is not None)

    for block in document.blocks:
        if block.order_id is not None and order_counts[block.order_id] > 1:
            result.errors.append(
                ValidationIssue(
                    block_id=block.id,
                    field="orderId",
                    message=f"Duplicate orderId {block.order_id} found",
                )
            )

        match block:
            case ImageBlock() if not block.content.image_url:
                result.errors.append(
                    ValidationIssue(block_id=block.id, field="imageUrl", message="Image URL is required")
                )
            case ButtonBlock() if not block.content.text:
                result.errors.append(
                    ValidationIssue(block_id=block.id, field="text", message="Button text is required")
                )
            case TextBlock() if not block.content.text.strip():
                result.warnings.append(
                    ValidationIssue(block_id=block.id, field="text", message="Text block is empty")
                )
            case UnknownBlock():
                result.warnings.append(
                    ValidationIssue(
                        block_id=block.id,
                        field="blockType",
                        message=f"Unknown block type: {block.block_type or '<missing>'}",
                    )
                )
            case _:
                pass

    return result
