from pydantic_settings import BaseSettings, SettingsConfigDict


GAS_URL = (
    'https://script.google.com/macros/s/AKfycbyi2wEWRruFsSEzFr4gxNiaF_k_aWkL6'
    'cxiFAMN0XeVPRCC8pSqCj3a20er4--ZSUMw/exec'
)


class AppSetting(BaseSettings):
    log_level: str = 'DEBUG'
    api_prefix: str = '/api/v1'
    enable_file_logging: bool = False
    log_file_path: str = 'app.log'

    lookup_url: str = GAS_URL

    storage_path: str = 'storage.json'
    history_key: str = 'searches'

    map_center_lat: float = 33.7756222
    map_center_long: float = -84.398479
    map_zoom: int = 13
    result_zoom: int = 10
    tile_url: str = 'https://tile.openstreetmap.org/{z}/{x}/{y}.png'
    tile_max_zoom: int = 19
    icon_url_template: str = 'https://openweathermap.org/img/wn/{icon}@2x.png'

    model_config = SettingsConfigDict(env_prefix='APP_')


app_settings = AppSetting()
