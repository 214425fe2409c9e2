from .csv_out import csv_blocks, schedule_to_dict, write_csv_blocks, write_schedule_json

__all__ = ["csv_blocks", "write_csv_blocks", "schedule_to_dict", "write_schedule_json"]
