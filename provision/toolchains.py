"""Language toolchain version managers (SDKMAN!, nvm)."""

from .context import ProvisionContext


def fetch_and_run(url: str, curl_flags: str = "-fsSL") -> str:
    """Command that pipes a remote install script into bash."""
    return f"curl {curl_flags} {url} | bash"


def setup_java_and_nvm(ctx: ProvisionContext) -> None:
    """Install SDKMAN! and nvm from their upstream install scripts."""
    ctx.log("Installing SDKMan and NVM (non-interactive)...")
    ctx.run("setup_java_and_nvm", "install_sdkman", fetch_and_run(ctx.settings.sdkman_url, "-s"))
    ctx.pause()
    ctx.run("setup_java_and_nvm", "install_nvm", fetch_and_run(ctx.settings.nvm_url))
