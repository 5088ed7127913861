from pydantic import BaseModel, EmailStr, Field


# -----------------------------------------------------
# SIGNUP
# -----------------------------------------------------
class SignupRequest(BaseModel):
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    # Validated against Role by the credential service so an
    # unknown value surfaces as InvalidRole rather than a 422
    designation: str = Field(..., description="student, faculty or hod")


class SignupResponse(BaseModel):
    message: str
    redirect: str


# -----------------------------------------------------
# LOGIN
# -----------------------------------------------------
class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    message: str
    token: str
    role: str
    redirect: str


# -----------------------------------------------------
# PUBLIC ACCOUNT VIEW (no password hash)
# -----------------------------------------------------
class UserRead(BaseModel):
    id: str
    username: str
    email: str
    role: str
