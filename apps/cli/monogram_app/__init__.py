"""Command line tool for rendering monogram avatars."""
