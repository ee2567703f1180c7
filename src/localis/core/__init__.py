"""Localis core: settings of the command line tool."""
