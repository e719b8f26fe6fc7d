import subprocess
import os
import sys

python_executable = sys.executable

def start_api_server():
    """
    API sunucusunu uvicorn ile başlatır ve kapanana kadar bekler.
    """
    port = os.getenv("PORT", "8001")
    command = [python_executable, "-m", "uvicorn", "panel_api.api_ana:app", "--port", port]
    if os.getenv("RELOAD", "1") == "1":
        command.append("--reload")

    try:
        print(f"API sunucusu başlatılıyor (port {port})...")
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError as e:
        print(f"HATA: API sunucusu beklenmedik şekilde kapandı: {e}")
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    start_api_server()
    print("Program sonlandı.")
