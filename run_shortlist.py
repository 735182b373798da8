"""Run a shortlist from the project root. Use: python run_shortlist.py shortlist --manifest job.json"""
import sys

from shortlist_ai.cli import main

sys.exit(main())
