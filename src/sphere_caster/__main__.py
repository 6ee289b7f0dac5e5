import sys

from sphere_caster.main import main

if __name__ == "__main__":
    sys.exit(main())
