# 📄 File: plant_tracker/modules/plant_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# The sign-in form and the "are you signed in?" answer.
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for the placeholder authentication-flag endpoints.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# plant management auth endpoints

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Any non-blank email and password sign in; credentials are not checked."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class RegisterRequest(LoginRequest):
    """Sign-up form: same as signing in, plus a display name that cannot be blank."""

    name: str = Field(..., min_length=1, max_length=120)


class AuthStatusResponse(BaseModel):
    authenticated: bool
