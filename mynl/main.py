# mynl/main.py
# Console entry point

from .cli.app import app

if __name__ == "__main__":
    app()
