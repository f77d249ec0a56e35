"""Auth HTTP Schemas."""

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """토큰 쌍 응답."""

    grant_type: str = Field(default="Bearer", description="토큰 타입")
    access_token: str = Field(..., description="Access 토큰")
    refresh_token: str = Field(..., description="리프레시 토큰")
    access_expires_at: int = Field(..., description="Access 토큰 만료 시각 (Unix timestamp)")
    refresh_expires_in: int = Field(..., description="리프레시 토큰 유효 시간(초)")


class CurrentUserResponse(BaseModel):
    """현재 사용자 응답."""

    user_id: int = Field(..., description="사용자 ID (익명은 0)")
    authenticated: bool = Field(..., description="인증 여부")
    nickname: str | None = Field(None, description="닉네임")
    role: str | None = Field(None, description="권한")
    name: str | None = Field(None, description="표시 이름")


class LogoutResponse(BaseModel):
    """로그아웃 응답."""

    success: bool = Field(default=True, description="성공 여부")
