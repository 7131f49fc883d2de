"""Example: drive the sync client from a terminal, without Flask.

Loads today's roster, lets you toggle students by id, then save or submit.
"""

from config import load_settings

from src.aura_panel.aura_panel.common.logger import configure_logging
from src.aura_panel.aura_panel.container import build_container
from src.aura_panel.aura_panel.core.constants import MSG_SUBMIT_CONFIRM


def print_panel(client, class_name):
    view = client.view()
    print(f"AURA - Teacher Panel | Class: {class_name} | state: {view.state.value}")
    if view.error:
        print(f"  ! {view.error}")
    if view.info:
        print(f"  * {view.info}")
    if view.snapshot:
        print(f"  Date: {view.snapshot.date}  Present: {view.snapshot.present_count}/{view.snapshot.total}")
        for s in view.snapshot.students:
            mark = "x" if s.present else " "
            print(f"  [{mark}] {s.student_id:>4} {s.roll_no:<6} {s.name:<24} {s.source.value}")
    print(f"Connected to device: {view.device_url}")


def main():
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL, None)
    container = build_container(
        device_config={"base_url": settings.DEVICE_BASE_URL, "timeout": settings.DEVICE_TIMEOUT_SECONDS},
        class_name=settings.CLASS_NAME,
    )
    client = container.sync_client

    try:
        while True:
            print_panel(client, container.class_name)
            cmd = input("[r]efresh, [t <id>] toggle, [s]ave, [u]bmit, [q]uit > ").strip()
            if cmd == "q":
                break
            if cmd == "r":
                client.load()
            elif cmd.startswith("t "):
                raw = cmd[2:].strip()
                client.toggle_presence(int(raw) if raw.isdigit() else raw)
            elif cmd == "s":
                client.save_changes()
            elif cmd == "u":
                if input(f"{MSG_SUBMIT_CONFIRM} [y/N] ").strip().lower() == "y":
                    client.submit()
    finally:
        container.conn.close()


if __name__ == "__main__":
    main()
