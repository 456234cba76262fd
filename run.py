import os
import subprocess
import sys

# PORT from environment, default 8501
port = os.environ.get("PORT", "8501")

try:
    port_int = int(port)
except ValueError:
    print(f"Invalid PORT value: {port}, using 8501")
    port_int = 8501

print(f"Starting Device Care on port {port_int}")

app_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "app.py")

cmd = [
    sys.executable, "-m", "streamlit", "run", app_path,
    f"--server.port={port_int}",
    "--server.address=0.0.0.0",
    "--server.headless=true",
]

print(f"Running command: {' '.join(cmd)}")
subprocess.run(cmd)
