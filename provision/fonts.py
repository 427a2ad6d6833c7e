"""Nerd Font download and installation."""

from pathlib import Path
from shlex import quote
from typing import List
from urllib.parse import urlparse

from .context import ProvisionContext


def archive_name(url: str) -> str:
    """File name a download URL is saved under (wget -P semantics)."""
    return Path(urlparse(url).path).name


def font_archives(ctx: ProvisionContext) -> List[Path]:
    """Local paths of the configured font archives."""
    return [ctx.paths.fonts_dir / archive_name(url) for url in ctx.settings.font_urls]


def download_fonts(ctx: ProvisionContext) -> None:
    """Fetch each font archive into the fonts dir, resuming partial downloads."""
    fonts_dir = ctx.paths.fonts_dir
    ctx.run("download_fonts", "mkdir", f"mkdir -p {quote(str(fonts_dir))}")

    for i, url in enumerate(ctx.settings.font_urls):
        if i:
            ctx.pause()
        ctx.log(f"Downloading {archive_name(url)}...")
        ctx.run("download_fonts", "download", f"wget -c {url} -P {quote(str(fonts_dir))}/")


def install_fonts(ctx: ProvisionContext) -> None:
    """Extract the font archives in place and rebuild the font cache."""
    ctx.log("Installing fonts...")
    fonts_dir = quote(str(ctx.paths.fonts_dir))
    for archive in font_archives(ctx):
        ctx.run("install_fonts", "unzip", f"unzip -q -o {quote(str(archive))} -d {fonts_dir}/")
    ctx.run("install_fonts", "fc_cache", "fc-cache -f -v")
