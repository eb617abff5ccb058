import os
from dotenv import load_dotenv
load_dotenv()

class Settings:
    APP_NAME = os.getenv("APP_NAME", "bicho-api")
    APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
    APP_ENV = os.getenv("APP_ENV", "dev")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8000"))
    TZ = os.getenv("TZ", "America/Sao_Paulo")

    MYSQL_DSN = (
        f"mysql+aiomysql://{os.getenv('MYSQL_USER','root')}:{os.getenv('MYSQL_PASSWORD','123456')}"
        f"@{os.getenv('MYSQL_HOST','127.0.0.1')}:{os.getenv('MYSQL_PORT','3306')}/{os.getenv('MYSQL_DB','bicho')}?charset=utf8mb4"
    )

    # tokens are issued by the account service, we only verify them
    JWT_SECRET = os.getenv("JWT_SECRET", "change_me")

    # seed values for the system_settings row (admins edit the row afterwards)
    DEFAULT_MIN_BET_AMOUNT = os.getenv("DEFAULT_MIN_BET_AMOUNT", "5.00")
    DEFAULT_MAX_BET_AMOUNT = os.getenv("DEFAULT_MAX_BET_AMOUNT", "10000.00")
    DEFAULT_MAX_PAYOUT = os.getenv("DEFAULT_MAX_PAYOUT", "1000000.00")
    DEFAULT_BET_AMOUNT = os.getenv("DEFAULT_BET_AMOUNT", "10.00")

    SETTLE_POLL_SECONDS = int(os.getenv("SETTLE_POLL_SECONDS", "5"))

settings = Settings()
