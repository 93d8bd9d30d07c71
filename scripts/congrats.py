# congrats.py
# Decode the ROT13 congratulations message and print it.
from katas.cli import congrats_main

if __name__ == "__main__":
    congrats_main()
