"""Run with: python -m complexplane"""
from complexplane.main import main

main()
