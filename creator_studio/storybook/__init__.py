"""Children's storybook illustration studio: project state, prompt assembly, generation."""
