"""
Runs makernote decoding in command line.
"""

import getopt
import sys
import timeit

from . import __version__, process_makernote
from .exif_log import get_logger, setup_logger
from .utils import InvalidMakernote, MakernoteNotFound

logger = get_logger()


def usage(exit_status: int) -> None:
    """Show command line usage."""
    msg = 'Usage: makernotes [OPTIONS] file1 [file2 ...]\n'
    msg += 'Decode the camera makernote stored in each file.\n\nOptions:\n'
    msg += '-h --help                  Display usage information and exit.\n'
    msg += '-v --version               Display version information and exit.\n'
    msg += '-m MAKE --make MAKE        Camera make the makernote came from.\n'
    msg += '-e I|M --endian I|M        Byte order of the enclosing TIFF data (default M).\n'
    msg += '-o OFFSET --offset OFFSET  Start of the makernote within the file.\n'
    msg += '-s --strict                Run in strict mode (stop on errors).\n'
    msg += '-d --debug                 Run in debug mode (display extra info).\n'
    msg += '-c --color                 Output in color (only works with debug on POSIX).\n'
    print(msg)
    sys.exit(exit_status)


def show_version() -> None:
    """Show the program version."""
    print('Version %s' % __version__)
    sys.exit(0)


def main(args=None) -> None:
    """Parse command line options/arguments and execute."""
    try:
        arg_names = ['help', 'version', 'strict', 'debug', 'color', 'make=', 'endian=', 'offset=']
        opts, args = getopt.getopt(sys.argv[1:] if args is None else args, 'hvsdcm:e:o:', arg_names)
    except getopt.GetoptError:
        usage(2)

    make = ''
    endian = 'M'
    offset = 0
    debug = False
    strict = False
    color = False

    for option, arg in opts:
        if option in ('-h', '--help'):
            usage(0)
        if option in ('-v', '--version'):
            show_version()
        if option in ('-m', '--make'):
            make = arg
        if option in ('-e', '--endian'):
            endian = arg.upper()
            if endian not in ('I', 'M'):
                usage(2)
        if option in ('-o', '--offset'):
            try:
                offset = int(arg, 0)
            except ValueError:
                usage(2)
        if option in ('-s', '--strict'):
            strict = True
        if option in ('-d', '--debug'):
            debug = True
        if option in ('-c', '--color'):
            color = True

    if not args:
        usage(2)

    setup_logger(debug, color)

    # output info for each file
    for filename in args:
        file_start = timeit.default_timer()
        try:
            with open(str(filename), 'rb') as img_file:
                data = img_file.read()
        except IOError:
            logger.error("'%s' is unreadable", filename)
            continue
        logger.info('Opening: %s', filename)

        try:
            directory = process_makernote(data, make, endian, strict=strict, makernote_offset=offset)
        except (InvalidMakernote, MakernoteNotFound) as err:
            logger.error('%s: %s', filename, err)
            continue

        if directory is None:
            logger.warning('No makernote information found\n')
            continue

        for tag in sorted(directory.tags, key=lambda t: t.tag):
            logger.info('%s (%s): %s', tag.tag_name, tag.tag_id, tag.printable)
        for error in directory.errors:
            logger.info('Error: %s', error)

        file_stop = timeit.default_timer()
        logger.debug('File processed in %s seconds', file_stop - file_start)
        print('')


if __name__ == '__main__':
    main()
