import uvicorn

from config.settings import app_settings


if __name__ == '__main__':
    uvicorn.run(
        'weather_map.asgi:app',
        host='127.0.0.1',
        port=8000,
        log_level=app_settings.log_level.lower(),
    )
