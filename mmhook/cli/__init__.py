"""mmhook command line interface."""
