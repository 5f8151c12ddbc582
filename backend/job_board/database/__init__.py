from job_board.database.mongo import motor_client, init_mongo, close_mongo

__all__ = ["motor_client", "init_mongo", "close_mongo"]
