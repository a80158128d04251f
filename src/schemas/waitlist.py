from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class WaitlistEntry(BaseModel):
    email: str = Field(
        ...,
        description="Normalized (trimmed, lower-cased) email address",
        example="user@example.com"
    )
    source: str = Field(
        ...,
        description="UI surface that produced the signup",
        example="landing_hero"
    )
    created_at: Optional[datetime] = Field(
        None,
        description="Server-assigned signup timestamp"
    )

class InsertResult(BaseModel):
    created: bool = Field(
        ...,
        description="False when the email was already on the waitlist"
    )
    entry: Optional[WaitlistEntry] = None

class WaitlistJoinResponse(BaseModel):
    success: bool = True
    message: str
    alreadyRegistered: Optional[bool] = None

class WaitlistErrorResponse(BaseModel):
    success: bool = False
    error: str
