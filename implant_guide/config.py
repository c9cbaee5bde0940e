from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "AutoImplant Guide"
    CORS_ORIGINS: list[str] = ["*"]

    # Planning policy
    # True keeps the reference behaviour: when no standard length fits the
    # clearance, recommend the shortest implant anyway. False rejects the site.
    ALLOW_UNDERSIZED_LENGTH: bool = True
    DEFAULT_BONE_SLOPE: float = 0.0

    class Config:
        env_file = ".env"


settings = Settings()
