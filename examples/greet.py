import logging
import sys

import optscan.registry
import optscan.scan


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    registry = optscan.registry.Registry()
    registry.register('name', 'name', 'n', required=True, usage='who to greet')
    registry.register('shout', 'shout', 's', is_bool=True, usage='use upper case')
    registry.register('help', 'help', 'h', is_bool=True, usage='print this message')

    result = optscan.scan.scan(registry)

    if registry.get_bool('help') or result.has_error:
        if result.has_error and not registry.get_bool('help'):
            logging.error('%s', result.error)
        print(f'usage: {sys.argv[0]} [options] [words...]', file=sys.stderr)
        print(registry.usage(), end='', file=sys.stderr)
        sys.exit(2 if result.has_error else 0)

    greeting = f'Hello, {result.get_string("name")}! {" ".join(result.args)}'.strip()
    if result.get_bool('shout'):
        greeting = greeting.upper()
    print(greeting)
