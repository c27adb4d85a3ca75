"""Access-gate request and response schemas.

Request bodies accept the camelCase names the dashboard frontend sends
(``confirmPassword``) as well as snake_case.
"""


from pydantic import Field, model_validator

from audit_dashboard.schemas.common import ApiModel

MIN_PASSWORD_LENGTH = 6

class LoginRequest(ApiModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    model_config = {"str_strip_whitespace": True}

class UserOut(ApiModel):
    id: int
    email: str
    role: str

class LoginResponse(ApiModel):
    message: str = "Login successful"
    token: str
    user: UserOut

class VerifyResponse(ApiModel):
    valid: bool = True
    user: UserOut

class CreateAdminRequest(ApiModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str = Field(alias="confirmPassword")

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self

class UpdatePasswordRequest(ApiModel):
    current_password: str = Field(min_length=1, alias="currentPassword")
    new_password: str = Field(min_length=MIN_PASSWORD_LENGTH, alias="newPassword")
    confirm_password: str = Field(alias="confirmPassword")

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self
