from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Defaults:
    script_name: str = "install.sh"
    remote_url: str = "https://raw.githubusercontent.com/Neurons-AI/vibecodekit/main/install.sh"
    shell: str = "bash"
    fetch_command: str = "curl -fsSL"
    config_env_var: str = "VIBECODEKIT_CONFIG"
    log_fallback_name: str = "vibecodekit-launcher.log"


DEFAULTS = Defaults()
