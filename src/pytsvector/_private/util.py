import shutil
import subprocess


def quote(text: str) -> str:
    """Wrap a lexeme in single quotes, doubling backslashes and quotes."""
    return "'" + text.replace('\\', '\\\\').replace("'", "''") + "'"


def check_graphviz_installed() -> bool:
    """True if the Graphviz `dot` executable can be run."""
    if shutil.which("dot") is None:
        return False
    try:
        subprocess.run(["dot", "-V"], check=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False
