"""Base Pydantic model configuration for discovery payload models.

All payload models inherit from DiscoveryBaseModel to ensure consistent behavior:
- Immutability (frozen=True) so a built payload cannot drift before it is encoded
- Strict validation (extra="forbid") to keep the wire field set fixed
- Flexible field naming (populate_by_name=True) since wire keys are aliases
"""

from pydantic import BaseModel, ConfigDict


class DiscoveryBaseModel(BaseModel):
    """Base model for all discovery payloads.

    Wire keys such as ``WebKit-Version`` or ``webSocketDebuggerUrl`` are
    declared as aliases; Python code uses snake_case names and the encoder
    dumps by alias.

    Example:
        >>> from pydantic import Field
        >>> class MyPayload(DiscoveryBaseModel):
        ...     page_id: str = Field(alias="pageId")
        >>>
        >>> MyPayload(page_id="1").model_dump(by_alias=True)
        {'pageId': '1'}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        # Host collaborators are opaque; never coerce their values silently
        strict=True,
        validate_default=True,
    )
