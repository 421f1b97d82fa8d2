from .result_record import EndReason, ResultLog, ResultRecord

__all__ = ["EndReason", "ResultLog", "ResultRecord"]
