#!/usr/bin/env python3
"""
TRODDR Link Previews - Run Script
This script starts the FastAPI link-preview server
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def main():
    print_colored("🚀 Starting TRODDR link-preview server...", "blue")

    check_file_exists("troddr/main.py", "troddr/main.py not found. Please run this script from the backend directory.")

    env_path = Path("../.env")
    if not env_path.exists() and not os.environ.get("SUPABASE_ANON_KEY"):
        print_colored("⚠️  Warning: no .env file and SUPABASE_ANON_KEY is not set.", "yellow")
        print("Lookups will fall back to default titles and images. Create a .env with:")
        print("  SUPABASE_URL=https://<project>.supabase.co")
        print("  SUPABASE_ANON_KEY=your_anon_key_here")
        print("  SITE_BASE_URL=https://troddr.com")
        print("  LOGGER=20")
        print()

    port = os.environ.get("PORT", "8000")
    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Service will be available at: http://localhost:{port}")
    print(f"📍 Health check: http://localhost:{port}/health")
    print(f"📍 Try a preview: curl -A Twitterbot http://localhost:{port}/listings/<slug>")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "troddr.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", port
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
