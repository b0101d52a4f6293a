"""
Simulator logger with incremental log files
"""

import time
from pathlib import Path
from datetime import datetime
from .duck import behaviour_name

class SimulatorLogger:
    """Simulator logger with timestamped log files"""
    
    def __init__(self, log_dir: str = "logs", max_logs: int = 0,
                 log_to_console: bool = True, run_id: str = "ducks"):
        """
        Initialize logger with log directory
        
        Args:
            log_dir: Directory to store log files
            max_logs: Maximum number of logs to keep (0 = unlimited)
            log_to_console: Echo every log line to stdout
            run_id: Prefix for log and index file names
        """
        self.log_dir = Path(log_dir)
        self.max_logs = max_logs
        self.log_to_console = log_to_console
        self.run_id = run_id
        
        self.log_dir.mkdir(parents=True, exist_ok=True)
        
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        run_number = self._get_next_run_number()
        self.log_file = self.log_dir / f"{self.run_id}_run_{run_number:04d}_{timestamp}.log"
        self.index_file = self.log_dir / f"{self.run_id}_run_index.txt"
        
        self._write_header()
        
        if self.max_logs > 0:
            self._cleanup_old_logs()
    
    def _get_next_run_number(self) -> int:
        """Get the next sequential run number"""
        log_files = sorted(self.log_dir.glob(f"{self.run_id}_run_*.log"))
        
        if not log_files:
            return 1
        
        # Filename is "<run_id>_run_NNNN_<date>_<time>", run_id may itself contain '_'
        last_file = log_files[-1].stem
        try:
            run_num = int(last_file[len(self.run_id):].split('_')[2])
            return run_num + 1
        except (IndexError, ValueError):
            return 1
    
    def _write_header(self):
        """Write log file header with metadata"""
        header = f"""
{'='*70}
DUCK SIMULATOR LOG (Run: {self.run_id})
{'='*70}
Log File: {self.log_file.name}
Start Time: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}
{'='*70}

"""
        with open(self.log_file, 'w') as f:
            f.write(header)
    
    def _cleanup_old_logs(self):
        """Remove old log files if we exceed max_logs"""
        log_files = sorted(self.log_dir.glob(f"{self.run_id}_run_*.log"))
        
        if len(log_files) > self.max_logs:
            files_to_remove = log_files[:-self.max_logs]
            for old_log in files_to_remove:
                old_log.unlink()
                if self.log_to_console:
                    print(f"Removed old log: {old_log.name}")
    
    def log(self, message: str, level: str = "info"):
        """Log a message with the specified level"""
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        log_line = f"[{timestamp}] [{level.upper()}] {message}"
        
        with open(self.log_file, "a") as f:
            f.write(log_line + "\n")
        
        if not self.log_to_console:
            return
        
        colors = {
            'error': '\033[91m',    # Red
            'warning': '\033[93m',  # Yellow
            'info': '\033[0m',      # Default
            'debug': '\033[90m'     # Gray
        }
        reset = '\033[0m'
        
        color = colors.get(level, colors['info'])
        print(f"{color}{log_line}{reset}")
    
    def log_flock(self, ducks, title: str = "FLOCK"):
        """Log a roster of ducks and the behaviours they currently hold"""
        self.log(f"{title}:", "info")
        for duck in ducks:
            self.log(
                f"  {duck.id:<16} {type(duck).__name__:<14} "
                f"quack={behaviour_name(duck.quack_behaviour):<12} "
                f"fly={behaviour_name(duck.fly_behaviour)}",
                "info"
            )
    
    def log_summary(self, summary_data: dict, ducks=()):
        """Log run summary with the final flock and update index"""
        ducks = list(ducks)
        self.log("", "info")
        self.log("="*70, "info")
        self.log("RUN SUMMARY", "info")
        self.log("="*70, "info")
        
        for key, value in summary_data.items():
            self.log(f"{key}: {value}", "info")
        if ducks:
            self.log_flock(ducks, "Final flock")
        
        self.log("="*70, "info")
        
        self._update_index(summary_data, ducks)
    
    def _update_index(self, summary_data: dict, ducks: list):
        """Append one line per run: counts plus each duck's final behaviours"""
        flock = ", ".join(
            f"{duck.id}={behaviour_name(duck.quack_behaviour)}/{behaviour_name(duck.fly_behaviour)}"
            for duck in ducks
        ) or "N/A"
        index_line = (
            f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')} | "
            f"{self.log_file.name} | "
            f"Rounds: {summary_data.get('Rounds', 'N/A')} | "
            f"Swaps: {summary_data.get('Swaps applied', 'N/A')} | "
            f"Flock: {flock}\n"
        )
        
        if not self.index_file.exists():
            with open(self.index_file, 'w') as f:
                f.write(f"RUN INDEX (Run: {self.run_id})\n")
                f.write("Timestamp | Log File | Rounds | Swaps | Flock (id=quack/fly)\n")
        
        with open(self.index_file, 'a') as f:
            f.write(index_line)
