"""Extensions contributing to the GraphQL schema."""
