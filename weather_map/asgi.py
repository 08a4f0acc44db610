from weather_map.app import create_app


app = create_app()
