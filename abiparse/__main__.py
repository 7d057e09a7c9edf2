#!/usr/bin/env python3
# -*- coding: UTF-8 -*-
from abiparse.cli import abiparse_cli

if __name__ == "__main__":
    abiparse_cli._parse_cli_args()
