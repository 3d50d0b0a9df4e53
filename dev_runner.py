import subprocess
import sys
from pathlib import Path

from watchfiles import watch

WATCH_DIRS = ("core", "qt", "system")
RESTART_SUFFIXES = {".py", ".json"}


def demo_command(extra_args=()):
    return [sys.executable, "main.py", "--debug", *extra_args]


def should_restart(changed_paths):
    return any(Path(path).suffix in RESTART_SUFFIXES for _change, path in changed_paths)


def main(argv=None):
    extra_args = list(sys.argv[1:] if argv is None else argv)
    targets = [d for d in WATCH_DIRS if Path(d).is_dir()] + [str(p) for p in Path(".").glob("*.json")]
    process = subprocess.Popen(demo_command(extra_args))
    try:
        for changes in watch(*targets, recursive=True):
            if not should_restart(changes):
                continue
            print("[dev] change detected, restarting slider demo")
            process.terminate()
            process.wait()
            process = subprocess.Popen(demo_command(extra_args))
    except KeyboardInterrupt:
        pass
    finally:
        if process.poll() is None:
            process.terminate()
            process.wait()


if __name__ == "__main__":
    main()
