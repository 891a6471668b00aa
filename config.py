"""
Конфигурационный файл для Telegram-бота калькулятора CPL
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Загружаем переменные окружения
load_dotenv()


class Settings(BaseSettings):
    """Настройки приложения через pydantic"""

    BOT_TOKEN: str = ""
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "bot.log"

    # Ссылки для кнопок меню
    CHANNEL_LINK: str = "https://t.me/shnurok_shipping"
    MANAGER_LINK: str = "https://t.me/tikhomirovkir"

    # Точность округления CPL (знаков после запятой)
    CPL_DECIMALS: int = 4

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'  # Игнорировать дополнительные переменные
    }


# Глобальный экземпляр настроек
settings = Settings()

# Основные настройки бота
BOT_TOKEN = settings.BOT_TOKEN

# Ссылки
CHANNEL_LINK = settings.CHANNEL_LINK
MANAGER_LINK = settings.MANAGER_LINK

# Калькулятор
CPL_DECIMALS = settings.CPL_DECIMALS

# Логирование
LOG_LEVEL = settings.LOG_LEVEL
LOG_FILE = settings.LOG_FILE

# Языки
SUPPORTED_LANGUAGES = ["ru", "en"]
DEFAULT_LANGUAGE = "ru"
