"""
main.py - Launcher for running Flash from a source checkout
"""
from flash.app_main import main

if __name__ == "__main__":
    main()
