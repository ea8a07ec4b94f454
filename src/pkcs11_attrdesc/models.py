"""
Data models for PKCS#11 attribute descriptors.
"""

from pydantic import BaseModel, ConfigDict, Field


CK_ULONG_MAX = 0xFFFFFFFF


class AttributeDescriptor(BaseModel):
    """A single PKCS#11 attribute type and the name it is declared under.

    Attributes:
        name: ASCII attribute name as declared in the PKCS#11 header (e.g., "CKA_LABEL")
        code: Numeric attribute type, an unsigned 32-bit integer (e.g., 0x03)
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., strict=True, pattern=r"^[\x00-\x7f]*$", description="ASCII attribute name, typically CKA_*")
    code: int = Field(..., strict=True, ge=0, le=CK_ULONG_MAX, description="CK_ATTRIBUTE_TYPE value")


class AttributeTable(BaseModel):
    """On-disk attribute table document.

    Expected YAML format:
        revision: "2.40"
        attributes:
          - name: CKA_AC_ISSUER
            code: 0x00000083
    """
    model_config = ConfigDict(frozen=True)

    revision: str | None = Field(default=None, description="PKCS#11 revision the table targets")
    attributes: list[AttributeDescriptor] = Field(..., description="Attribute descriptors")
