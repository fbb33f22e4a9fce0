"""
BonCalc
Main application entry point
"""
import tkinter as tk
import subprocess
import sys
import socket
import atexit
import config
from gui import BonCalcGUI

# Web keypad process, if one is running
api_process = None


def get_local_ip():
    """Address phones on the same network can reach, or loopback"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            # UDP connect sends nothing; it only picks the outgoing interface
            s.connect(('10.255.255.255', 1))
            return s.getsockname()[0]
    except OSError:
        return '127.0.0.1'


def portal_urls():
    """(local, network) URLs of the web keypad"""
    return (
        f"http://localhost:{config.WEB_PORT}/api",
        f"http://{get_local_ip()}:{config.WEB_PORT}/api",
    )


def start_api_server():
    """Run api.py in its own process"""
    global api_process
    flags = subprocess.CREATE_NEW_CONSOLE if sys.platform == 'win32' else 0
    try:
        api_process = subprocess.Popen(
            [sys.executable, config.API_SCRIPT],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=flags,
        )
    except OSError as e:
        print(f"Failed to start API server: {e}")
        return

    local_url, network_url = portal_urls()
    print(f"API server started (PID: {api_process.pid})")
    print("="*60)
    print(f"{config.APP_NAME} web keypad")
    print(f"  this PC:   {local_url}")
    print(f"  network:   {network_url}")
    print("="*60)


def cleanup_api_server():
    """Stop the web keypad; safe to call more than once"""
    global api_process
    process, api_process = api_process, None
    if process is None:
        return
    try:
        process.terminate()
        process.wait(timeout=5)
        print("API server stopped")
    except (OSError, subprocess.TimeoutExpired) as e:
        print(f"Error stopping API server: {e}")


def main():
    if config.START_WEB_PORTAL:
        start_api_server()
        atexit.register(cleanup_api_server)

    root = tk.Tk()
    BonCalcGUI(root)
    try:
        root.mainloop()
    finally:
        cleanup_api_server()


if __name__ == "__main__":
    main()
