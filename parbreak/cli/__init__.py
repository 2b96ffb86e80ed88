"""Command-line subcommands for parbreak"""
