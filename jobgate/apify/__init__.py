# SPDX-License-Identifier: Apache-2.0
"""
Apify actor platform client.

- ActorClient.run(JobRequest) → raw dataset items
- sync (run-sync-get-dataset-items) or async (start + poll + fetch) per actor
"""
__all__ = ["ActorClient", "JobRequest", "JobRun", "SYNC", "ASYNC"]
from .client import ActorClient, JobRequest, JobRun, SYNC, ASYNC
