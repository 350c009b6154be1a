"""
Pydantic schemas for user input.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for inserting a user. The password arrives already hashed."""

    name: str = Field(
        ...,
        max_length=255,
        description="User's display name"
    )

    email: str = Field(
        ...,
        max_length=255,
        description="User email address"
    )

    password: str = Field(
        ...,
        max_length=255,
        description="Password hash"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Devin Sanders",
                "email": "tristanjacobs@gmail.com",
                "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
            }
        }
