"""
ads_txt — IAB ads.txt / app-ads.txt parser.

Classifies each line of an ads.txt file as a seller record or a variable
directive and assembles a document plus a report of malformed lines.

Built on the Railway-Oriented Programming (ROP) framework for
explicit, composable, functional error handling.
"""

__version__ = "0.1.0"
