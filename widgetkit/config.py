from dotenv import dotenv_values, load_dotenv

load_dotenv()
settings = dotenv_values()

DEFAULT_EMPTY_MESSAGE = settings.get("WIDGETKIT_EMPTY_MESSAGE") or "No data available"
DEFAULT_LOADING_MESSAGE = settings.get("WIDGETKIT_LOADING_MESSAGE") or "Loading..."
DEFAULT_ARIA_LABEL = settings.get("WIDGETKIT_ARIA_LABEL") or "Data table"
TABLE_ROUTE_PREFIX = settings.get("WIDGETKIT_TABLE_PREFIX") or "/table"
TABLE_ENGINE_CACHE_SIZE = int(settings.get("WIDGETKIT_ENGINE_CACHE_SIZE") or 1024)
