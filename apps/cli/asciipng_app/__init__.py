"""Command line front end for asciipng."""
