"""Text-console front end: prompts, narration and the program entry point."""
