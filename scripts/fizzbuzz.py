# fizzbuzz.py
# Print FizzBuzz for 1..15 between the start and end markers.
from katas.cli import fizzbuzz_main

if __name__ == "__main__":
    fizzbuzz_main()
