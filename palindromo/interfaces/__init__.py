"""Command line and terminal interfaces"""
