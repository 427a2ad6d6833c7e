"""Home directory scaffolding and dotfiles."""

from shlex import quote

from .context import ProvisionContext


def create_dev_and_studies_folders(ctx: ProvisionContext) -> None:
    """Create the workspace folders under ~/Documents."""
    ctx.log("Creating Dev and Studies folders...")
    folders = " ".join(
        quote(str(ctx.paths.workspace_dir / name)) for name in ctx.settings.workspace_folders
    )
    ctx.run("create_dev_and_studies_folders", "mkdir", f"mkdir -p {folders}")


def configure_git(ctx: ProvisionContext) -> None:
    """Seed ~/.gitconfig from the remote dotfiles."""
    ctx.log("Configuring Git...")
    ctx.run(
        "configure_git",
        "download_gitconfig",
        f"curl -fsS {ctx.settings.gitconfig_url} -o {quote(str(ctx.paths.gitconfig))}",
    )
