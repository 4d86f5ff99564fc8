"""
Lint script runner.
"""
import subprocess


def main():
    """
    Lint the golox project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./loxlang",
        "./golox.py",
        "--max-line-length=120",
        "--exclude=loxlang/tests"
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./loxlang",
        "./golox.py",
        "--max-line-length=120",
        "--ignore=tests"
    ], check=True)


if __name__ == "__main__":
    main()
