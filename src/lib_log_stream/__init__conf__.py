"""Static package metadata surfaced by the CLI banner and ``--version``."""

from __future__ import annotations

name = "lib_log_stream"
title = "Line-buffered text stream that hands every completed line to a logger"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_stream"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_stream"
