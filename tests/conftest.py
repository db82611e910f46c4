import pytest
import subprocess
import os
from pathlib import Path
import sys
import logging

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def fixed_source():
    """
    Provides a deterministic random source that records every request.
    The filler is a repeating pattern cut to the requested length.
    """
    requests = []

    def source(length):
        requests.append(length)
        return ("ABCDEFGHJK123456" * 2)[:length]

    source.requests = requests
    return source


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Removes handlers attached by setup_logging so tests stay isolated."""
    yield
    logger = logging.getLogger("mrn_generator")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_test_env(tmp_path, request):
    """
    Sets up a test environment with a temporary directory and a helper for running CLI commands.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        [str(SRC_DIR)] + ([env["PYTHONPATH"]] if env.get("PYTHONPATH") else [])
    )
    env.pop("MRN_COUNTRY_CODE", None)
    env.pop("MRN_DECLARATION_OFFICE", None)
    env.pop("MRN_LOG_LEVEL", None)

    def run_command(cmd, extra_env=None):
        full_cmd = [sys.executable, "-m", "mrn_generator"] + cmd
        result = subprocess.run(
            full_cmd,
            cwd=tmp_path,
            capture_output=True,
            text=True,
            check=False,
            env={**env, **(extra_env or {})},
        )

        if request.config.getoption("capture") == "no":
            if result.stdout:
                print(result.stdout)
            if result.stderr:
                print(result.stderr, file=sys.stderr)

        if result.returncode != 0:
            print("Error running command:", " ".join(full_cmd))
            print("Stdout:", result.stdout)
            print("Stderr:", result.stderr)
        return result

    return run_command, tmp_path
