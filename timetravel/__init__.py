"""Find dates in file names and rename the files to the YYYY-MM-DD form."""

__version__ = "0.1.0"