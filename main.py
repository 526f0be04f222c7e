import logging
import sys

from rich.pretty import pprint

from dashdash import *

parser = CommandLineParser(
    "grate",
    "Grate slices audio files into test buffers.",
    arguments=sys.argv,
    help_flag=True,
)
parser.register("input", "i", "path of the file to slice", index=0)
parser.register("output", "o", "directory the buffers are written to", index=1)
parser.register("length", "l", "buffer length in samples")
parser.register("verbose", "v", "log how every value was resolved", switch=True)


if __name__ == '__main__':
    if parser.bool("verbose"):
        logging.basicConfig(level=logging.DEBUG)
    if parser.bool("help"):
        parser.print_help()
    else:
        pprint(parser)
        pprint({
            "input": parser.string("input"),
            "output": parser.dir("output"),
            "length": parser.int("length"),
            "unflagged": parser.unflagged_arguments(),
        })
