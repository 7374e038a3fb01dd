# EMU Log: scheduled train-number collector
