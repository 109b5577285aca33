"""Course recommendation service: questionnaire in, ranked courses out."""
