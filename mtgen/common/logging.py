# mtgen/common/logging.py
from datetime import datetime

def _ts():
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

def _emit(level: str, msg: str):
    print(f"{_ts()} | {level:<5} | {msg}")

def info(msg: str): _emit("INFO", msg)
def warn(msg: str): _emit("WARN", msg)
def ok(msg: str):   _emit("OK", msg)
