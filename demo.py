import logging
from dotenv import load_dotenv
from config.settings import Settings
from cuentabank.models import Account, Bank, InsufficientFundsError
from cuentabank.services.report import render_accounts

load_dotenv()

# Load settings from environment variables
settings = Settings.load()

logger = logging.getLogger('cuentabank')
logger.setLevel(settings.log_level)
handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
logger.addHandler(handler)

bank = Bank(settings.bank_name)
first = Account('Cliente 1', 1000)
second = Account('Cliente 2', 1000)
bank.register(first)
bank.register(second)

bank.transfer(first, second, 500)

try:
    bank.transfer(first, second, 1500)
except InsufficientFundsError as e:
    logger.warning('Transfer rejected: %s (balance %s, requested %s)', e, e.balance, e.amount)

print(render_accounts(bank))
