"""repokit: generic paginated repository interfaces and stores."""
