import argparse
import logging

from .exercises import ShortestPathExercise

class Script():

    def create_parser(self):
        parser = argparse.ArgumentParser(description="pathgraph script")
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Log debug messages"
        )
        subparsers = parser.add_subparsers(dest="command")

        # Add subparser for the shortest-path exercise
        ShortestPathExercise.create_parser(subparsers)

        return parser

    def run(self, argv=None):
        parser = self.create_parser()
        args = parser.parse_args(argv)

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s"
        )

        if args.command == "shortest-path":
            exercise = ShortestPathExercise()
            try:
                exercise.parse_args(args)
            except ValueError as e:
                parser.error(str(e))

            exercise.print_banner()
            exercise.generate()
        else:
            parser.print_help()

def main():
    Script().run()

if __name__ == "__main__":
    main()
