import sys

from sensu_teams.cli import main


if __name__ == '__main__':
    sys.exit(main())
