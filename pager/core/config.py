from pydantic_settings import BaseSettings

DEFAULT_PAGE_PARAM = "page"
DEFAULT_PAGE_SIZE_PARAM = "size"
DEFAULT_SORT_FIELD_PARAM = "sort"
DEFAULT_SORT_DIRECTION_PARAM = "dir"

DEFAULT_PAGE_SIZE = 15
DEFAULT_SORT_FIELD = "id"
DEFAULT_SORT_DIR = "asc"


class PagerSettings(BaseSettings):
    """Query parameter names used by the pager, loaded from `PAGER_*` env vars / .env file."""

    page_param: str = DEFAULT_PAGE_PARAM
    page_size_param: str = DEFAULT_PAGE_SIZE_PARAM
    sort_field_param: str = DEFAULT_SORT_FIELD_PARAM
    sort_direction_param: str = DEFAULT_SORT_DIRECTION_PARAM

    model_config = {
        "env_prefix": "PAGER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }

    @property
    def param_names(self) -> tuple[str, str, str, str]:
        return (
            self.page_param,
            self.page_size_param,
            self.sort_field_param,
            self.sort_direction_param,
        )


class AppSettings(BaseSettings):
    """Reference application configuration loaded from environment variables / .env file."""

    app_name: str = "Pager Demo API"
    app_env: str = "development"
    app_port: int = 8000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = AppSettings()
