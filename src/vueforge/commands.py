"""
vueforge.commands - Package Manager Commands
============================================

Detects which package manager launched vueforge and formats the follow-up
commands printed at the end of generation.

Supported package managers, in order of preference: pnpm > yarn > npm.
"""

from __future__ import annotations

import os


USER_AGENT_ENV = "npm_config_user_agent"


def detect_package_manager(user_agent: str | None = None) -> str:
    """
    Pick the package manager from an npm-style user agent string.

    Parameters
    ----------
    user_agent : str | None
        E.g. ``"pnpm/8.6.0 npm/? node/v18.16.0 linux x64"``. Read from the
        ``npm_config_user_agent`` environment variable when omitted.

    Returns
    -------
    str
        ``pnpm``, ``yarn`` or ``npm``.
    """
    if user_agent is None:
        user_agent = os.environ.get(USER_AGENT_ENV, "")
    if "pnpm" in user_agent:
        return "pnpm"
    if "yarn" in user_agent:
        return "yarn"
    return "npm"


def get_command(package_manager: str, script_name: str, args: str | None = None) -> str:
    """
    Format the shell command that runs ``script_name``.

    Examples
    --------
    >>> get_command("yarn", "install")
    'yarn'
    >>> get_command("npm", "dev")
    'npm run dev'
    >>> get_command("npm", "test:unit", "--run")
    'npm run test:unit -- --run'
    >>> get_command("pnpm", "build")
    'pnpm build'
    """
    if script_name == "install":
        return "yarn" if package_manager == "yarn" else f"{package_manager} install"

    if package_manager == "npm":
        command = f"npm run {script_name}"
        return f"{command} -- {args}" if args else command

    command = f"{package_manager} {script_name}"
    return f"{command} {args}" if args else command
