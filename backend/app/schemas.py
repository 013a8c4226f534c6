from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


# ---------------------------
# Contact Form Submission Schema
# ---------------------------
class SubmissionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to: EmailStr
    contact_name: str = Field(..., alias="contactName")
    body: str

    @field_validator("contact_name")
    def validate_contact_name(cls, v):
        if not v.strip():
            raise ValueError("Contact name cannot be empty")
        return v

    @field_validator("body")
    def validate_body(cls, v):
        if not v.strip():
            raise ValueError("Message body cannot be empty")
        return v


# ---------------------------
# Outbound Email Schema
# ---------------------------
class OutboundMessage(BaseModel):
    sender: str
    recipient: str
    subject: str
    html_body: str


# ---------------------------
# Message Response Schema
# ---------------------------
class MessageResponse(BaseModel):
    message: str
