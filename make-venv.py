"""Helper script that creates a virtual environment and installs QuizTaker into it."""

from __future__ import annotations

from pathlib import Path
import subprocess
import sys


def run_command(command: list[str]) -> None:
	subprocess.run(command, check=True)


def venv_python(venv_path: Path) -> Path:
	if sys.platform == "win32":
		return venv_path / "Scripts" / "python.exe"
	return venv_path / "bin" / "python"


def main() -> None:
	project_root = Path(__file__).resolve().parent
	venv_path = project_root / ".venv"
	print(f"Using Python interpreter: {sys.executable}")
	run_command([sys.executable, "-m", "venv", str(venv_path)])

	python_exe = venv_python(venv_path)
	run_command([str(python_exe), "-m", "pip", "install", "--upgrade", "pip"])
	# Editable install with the test extra so pytest runs against the working tree
	run_command([str(python_exe), "-m", "pip", "install", "-e", f"{project_root}[test]"])
	print(f"Done. Run the client with: {python_exe} app_main.py")


if __name__ == "__main__":
	main()
